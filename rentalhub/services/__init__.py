from .amenities import normalize_amenities
from .folder_store import FolderMappingStore, InMemoryFolderMappingStore, JsonFileFolderMappingStore
from .performance import PropertyPerformanceAggregator
from .photos import MappedFolderSource, PhotoFolderResolver, StoredPhotosSource, get_photo_resolver
