"""Content-addressed object storage for Delta.

Objects live under the store root using a two-character sharded layout::

    <root>/<id[:2]>/<id[2:]>

Each file holds ``zlib.compress(b"<type> <size>\\0" + payload)``. The store is
append-only: writing an object whose id already exists is a no-op.
"""

import logging
import zlib
from pathlib import Path
from typing import Tuple, Union

from .errors import CorruptObjectError, ObjectNotFoundError, ObjectStoreError
from .hash import hash_object, object_header
from .objects import DeltaObject, Blob, Tree, Commit
from ..utils.files import atomic_write

logger = logging.getLogger(__name__)

OBJECT_TYPES = {
    'blob': Blob,
    'tree': Tree,
    'commit': Commit,
}


class ObjectStore:
    """
    Durable, compressed, content-addressed object storage.

    The store only grows; nothing is ever rewritten or evicted.
    """

    def __init__(self, root: Union[str, Path]):
        """
        Initialize object store.

        Args:
            root: Objects directory (e.g. ``.delta/objects``)
        """
        self.root = Path(root)

    def object_path(self, obj_id: str) -> Path:
        """
        Get filesystem path for an object.

        Args:
            obj_id: 40-character SHA-1 hash

        Returns:
            Path: Full path to object file
        """
        return self.root / obj_id[:2] / obj_id[2:]

    def exists(self, obj_id: str) -> bool:
        """Check if object exists in the store."""
        return self.object_path(obj_id).exists()

    def store(self, obj: DeltaObject) -> str:
        """
        Write a Delta object to the store.

        Args:
            obj: Blob, Tree or Commit

        Returns:
            str: SHA-1 hash of the object
        """
        return self.store_raw(obj.type, obj.serialize())

    def store_raw(self, obj_type: str, payload: bytes) -> str:
        """
        Write a typed payload to the store.

        The id is the SHA-1 of ``<type> <len>\\0<payload>``. If an object with
        that id is already on disk nothing is written.

        Args:
            obj_type: 'blob', 'tree' or 'commit'
            payload: Object payload without header

        Returns:
            str: 40-character object id

        Raises:
            ObjectStoreError: If the object file cannot be created or written
        """
        content = object_header(obj_type, len(payload)) + payload
        obj_id = hash_object(content)
        path = self.object_path(obj_id)

        if path.exists():
            logger.debug("Object %s already in store, skipped", obj_id[:8])
            return obj_id

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            atomic_write(path, zlib.compress(content))
        except OSError as e:
            raise ObjectStoreError(
                f"Unable to write {obj_type} object {obj_id}: {e.strerror or e}"
            ) from e

        logger.debug("Stored %s %s (%d bytes)", obj_type, obj_id[:8], len(payload))
        return obj_id

    def read(self, obj_id: str) -> Tuple[str, bytes]:
        """
        Read the type and payload of an object.

        Args:
            obj_id: 40-character SHA-1 hash

        Returns:
            Tuple of (type, payload)

        Raises:
            ObjectNotFoundError: If the object does not exist
            CorruptObjectError: If the header or size is invalid
        """
        path = self.object_path(obj_id)

        if not path.exists():
            raise ObjectNotFoundError(f"Object {obj_id} not found")

        try:
            content = zlib.decompress(path.read_bytes())
        except zlib.error as e:
            raise CorruptObjectError(f"Object {obj_id} is not valid zlib data: {e}") from e

        null_idx = content.find(b'\0')
        if null_idx == -1:
            raise CorruptObjectError(f"Object {obj_id} has no header")

        header = content[:null_idx].decode('ascii', errors='replace')
        data = content[null_idx + 1:]

        try:
            obj_type, size_str = header.split(' ', 1)
            size = int(size_str)
        except ValueError:
            raise CorruptObjectError(f"Invalid object header: {header}")

        if len(data) != size:
            raise CorruptObjectError(
                f"Object size mismatch: expected {size}, got {len(data)}"
            )

        return obj_type, data

    def read_object(self, obj_id: str) -> DeltaObject:
        """
        Read and decode an object.

        Returns:
            DeltaObject: Blob, Tree or Commit
        """
        obj_type, data = self.read(obj_id)

        cls = OBJECT_TYPES.get(obj_type)
        if cls is None:
            raise CorruptObjectError(f"Unknown object type: {obj_type}")

        obj = cls()
        obj.deserialize(data)
        return obj

    def __repr__(self) -> str:
        return f"ObjectStore(root={self.root})"
