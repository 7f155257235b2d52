"""
Raster Store - bounded in-memory store of loaded rasters
"""

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from threading import RLock
from typing import Any, Dict, List, Optional

from core.constants import StoreConstants
from core.exceptions import RasterNotFoundError
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)


@dataclass
class RasterRecord:
    """Single stored raster"""

    id: str
    name: str
    raster: RasterBuffer
    created_at: datetime
    updated_at: datetime
    last_operation: Optional[str] = None
    operations_applied: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "width": self.raster.width,
            "height": self.raster.height,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "last_operation": self.last_operation,
            "operations_applied": self.operations_applied,
            "metadata": self.metadata,
        }


class RasterStore:
    """LRU store keeping the most recently used rasters"""

    def __init__(self, max_rasters: int = StoreConstants.DEFAULT_MAX_RASTERS):
        """
        Initialize Raster Store

        Args:
            max_rasters: Maximum number of rasters to keep
        """
        self.max_rasters = max_rasters
        self.records: "OrderedDict[str, RasterRecord]" = OrderedDict()

        # Statistics
        self.total_stored = 0
        self.evicted_count = 0

        # Thread safety (RLock allows reentrant locking)
        self.lock = RLock()

        logger.info(f"Raster Store initialized with max size: {max_rasters}")

    def store(
        self,
        raster: RasterBuffer,
        name: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Add raster to the store

        Args:
            raster: Raster to keep (the store takes ownership)
            name: Optional display name
            metadata: Optional metadata

        Returns:
            Raster ID
        """
        with self.lock:
            raster_id = f"{StoreConstants.ID_PREFIX}{uuid.uuid4().hex[:8]}"
            now = datetime.now()

            self.records[raster_id] = RasterRecord(
                id=raster_id,
                name=name or raster_id,
                raster=raster,
                created_at=now,
                updated_at=now,
                metadata=metadata or {},
            )
            self.total_stored += 1

            while len(self.records) > self.max_rasters:
                evicted_id, _ = self.records.popitem(last=False)
                self.evicted_count += 1
                logger.info(f"Evicted raster {evicted_id} (store full)")

            logger.debug(f"Stored raster {raster_id}: {raster.width}x{raster.height}")
            return raster_id

    def get_record(self, raster_id: str) -> RasterRecord:
        """Get stored record, marking it as recently used"""
        with self.lock:
            record = self.records.get(raster_id)
            if record is None:
                raise RasterNotFoundError(raster_id)
            self.records.move_to_end(raster_id)
            return record

    def get(self, raster_id: str) -> RasterBuffer:
        """Get raster by ID"""
        return self.get_record(raster_id).raster

    def has_raster(self, raster_id: str) -> bool:
        with self.lock:
            return raster_id in self.records

    def mark_updated(self, raster_id: str, operation: str) -> RasterRecord:
        """Record that an operation was applied to a stored raster"""
        with self.lock:
            record = self.get_record(raster_id)
            record.updated_at = datetime.now()
            record.last_operation = operation
            record.operations_applied += 1
            return record

    def delete(self, raster_id: str) -> bool:
        """Remove raster, returns False when it was not stored"""
        with self.lock:
            if self.records.pop(raster_id, None) is None:
                return False
            logger.debug(f"Deleted raster {raster_id}")
            return True

    def list_rasters(self) -> List[Dict[str, Any]]:
        """Describe stored rasters, newest first"""
        with self.lock:
            records = sorted(self.records.values(), key=lambda r: r.created_at, reverse=True)
            return [r.to_dict() for r in records]

    def get_stats(self) -> Dict[str, Any]:
        """Get store statistics"""
        with self.lock:
            memory_bytes = sum(r.raster.pixel_count for r in self.records.values())
            return {
                "count": len(self.records),
                "max_rasters": self.max_rasters,
                "total_stored": self.total_stored,
                "evicted": self.evicted_count,
                "memory_mb": round(memory_bytes / 1024 / 1024, 3),
            }

    def clear(self):
        """Remove all rasters"""
        with self.lock:
            self.records.clear()
            logger.info("Raster store cleared")
