"""Cache management with hash/mtime invalidation."""

import hashlib
import json
import logging
import shutil
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from chapterizer.cache.models import CachedSegmentation, CacheIndex, CacheMetadata
from chapterizer.models.extraction import SegmentationOptions, SegmentationResult

log = logging.getLogger(__name__)


class CacheManager:
    """Manages caching of segmentation results next to the source files."""

    CACHE_DIR = ".chapterizer_cache"
    INDEX_FILE = "index.json"
    CACHE_VERSION = "1.1"

    def __init__(self, project_dir: Path):
        self.cache_root = project_dir / self.CACHE_DIR
        self.index_path = self.cache_root / self.INDEX_FILE
        self._index: CacheIndex | None = None

    def _ensure_cache_dir(self) -> None:
        """Create cache directory if it doesn't exist."""
        self.cache_root.mkdir(parents=True, exist_ok=True)

    def _load_index(self) -> CacheIndex:
        """Load or create cache index."""
        if self._index is not None:
            return self._index

        if self.index_path.exists():
            try:
                data = json.loads(self.index_path.read_text())
                self._index = CacheIndex.model_validate(data)
            except (json.JSONDecodeError, ValidationError) as e:
                log.warning(f"Ignoring unreadable cache index: {e}")
                self._index = CacheIndex()
        else:
            self._index = CacheIndex()

        return self._index

    def _save_index(self) -> None:
        """Save cache index to disk."""
        self._ensure_cache_dir()
        index = self._load_index()
        self.index_path.write_text(index.model_dump_json(indent=2))

    @staticmethod
    def options_digest(options: SegmentationOptions, text_backend: str = "pypdf") -> str:
        """Digest of everything that changes the segmentation output."""
        key = f"{options.cache_key()};backend={text_backend}"
        return hashlib.sha256(key.encode("utf-8")).hexdigest()[:12]

    def _index_key(
        self, file_path: Path, options: SegmentationOptions, text_backend: str
    ) -> str:
        return f"{file_path.resolve()}::{self.options_digest(options, text_backend)}"

    def _entry_file(self, entry_key: str) -> Path:
        return self.cache_root / "results" / entry_key / "result.json"

    def get_file_hash(self, file_path: Path) -> str:
        """Compute SHA-256 hash of a file."""
        sha256 = hashlib.sha256()
        with open(file_path, "rb") as f:
            for chunk in iter(lambda: f.read(8192), b""):
                sha256.update(chunk)
        return sha256.hexdigest()

    def _load_entry(
        self, file_path: Path, options: SegmentationOptions, text_backend: str = "pypdf"
    ) -> tuple[CachedSegmentation, Path] | None:
        if not self.cache_root.exists():
            return None

        index = self._load_index()
        entry_key = index.entries.get(self._index_key(file_path, options, text_backend))
        if entry_key is None:
            return None

        cache_file = self._entry_file(entry_key)
        if not cache_file.exists():
            return None

        try:
            cached = CachedSegmentation.model_validate_json(cache_file.read_text())
        except ValidationError:
            log.warning(f"Ignoring corrupt cache entry: {cache_file}")
            return None

        if cached.cache_metadata.cache_version != self.CACHE_VERSION:
            return None

        return cached, cache_file

    def is_cache_valid(
        self,
        file_path: Path,
        options: SegmentationOptions,
        text_backend: str = "pypdf",
    ) -> bool:
        """Check if cached data exists and is still valid."""
        loaded = self._load_entry(file_path, options, text_backend)
        if loaded is None:
            return False
        cached, cache_file = loaded

        stat = file_path.stat()

        # Fast path: check mtime and size first
        if (
            cached.cache_metadata.file_mtime == stat.st_mtime
            and cached.cache_metadata.file_size == stat.st_size
        ):
            return True

        # Slow path: mtime changed, verify with hash
        current_hash = self.get_file_hash(file_path)
        if cached.cache_metadata.file_hash == current_hash:
            # File unchanged, update mtime in cache
            cached.cache_metadata.file_mtime = stat.st_mtime
            cache_file.write_text(cached.model_dump_json(indent=2))
            return True

        return False

    def get_cached_result(
        self, file_path: Path, options: SegmentationOptions, text_backend: str = "pypdf"
    ) -> SegmentationResult | None:
        """Retrieve a cached segmentation result if still valid."""
        if not self.is_cache_valid(file_path, options, text_backend):
            return None

        loaded = self._load_entry(file_path, options, text_backend)
        if loaded is None:
            return None
        return loaded[0].result

    def save_result(
        self,
        file_path: Path,
        options: SegmentationOptions,
        result: SegmentationResult,
        text_backend: str = "pypdf",
    ) -> None:
        """Save a segmentation result to cache."""
        stat = file_path.stat()
        file_hash = self.get_file_hash(file_path)
        digest = self.options_digest(options, text_backend)

        cached = CachedSegmentation(
            cache_metadata=CacheMetadata(
                file_path=str(file_path.resolve()),
                file_hash=file_hash,
                file_size=stat.st_size,
                file_mtime=stat.st_mtime,
                options_key=options.cache_key(),
                text_backend=text_backend,
                cached_at=datetime.now(),
                cache_version=self.CACHE_VERSION,
            ),
            result=result,
        )

        entry_key = f"{file_hash[:32]}-{digest}"
        cache_file = self._entry_file(entry_key)
        cache_file.parent.mkdir(parents=True, exist_ok=True)
        cache_file.write_text(cached.model_dump_json(indent=2))

        # Update index
        index = self._load_index()
        index.entries[self._index_key(file_path, options, text_backend)] = entry_key
        self._save_index()

    def clear_cache(self) -> int:
        """Clear all cached data. Returns number of entries cleared."""
        if not self.cache_root.exists():
            return 0

        results_dir = self.cache_root / "results"
        if results_dir.exists():
            count = len(list(results_dir.iterdir()))
        else:
            count = 0

        shutil.rmtree(self.cache_root)
        self._index = None
        return count

    def list_cached(self) -> list[tuple[str, str]]:
        """List cached results. Returns list of (path::options digest, entry key)."""
        index = self._load_index()
        return list(index.entries.items())
