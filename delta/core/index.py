"""Index (staging area) implementation."""

import logging
import os
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .errors import CorruptIndexError
from .hash import hash_digest
from .objects import BLOB_MODE, EXECUTABLE_MODE
from ..utils.files import atomic_write, is_executable

logger = logging.getLogger(__name__)

SIGNATURE = b'DIRC'
VERSION = 2
HEADER_FORMAT = '>4sII'
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)        # 12
ENTRY_FORMAT = '>IIIIIIIIII20sH'
ENTRY_METADATA_SIZE = struct.calcsize(ENTRY_FORMAT)  # 62
CHECKSUM_SIZE = 20
MAX_PATH_LENGTH = 0xFFFF

MODE_REGULAR = 0o100644
MODE_EXECUTABLE = 0o100755


def _u32(value: int) -> int:
    return value & 0xFFFFFFFF


def pad_entry(data: bytes) -> bytes:
    """
    Append NUL padding so the entry length is a multiple of 8.

    At least one NUL always terminates the path, so an entry that is already
    aligned gets a full 8 bytes.
    """
    padding = 8 - (len(data) % 8)
    return data + b'\0' * padding


def is_storable_path(path: str) -> bool:
    """True if ``path`` can be recorded in the index (ASCII, no NUL)."""
    return path.isascii() and '\0' not in path


@dataclass
class IndexEntry:
    """
    Represents a single entry in the index.

    Stores metadata about a staged file including timestamps,
    permissions, and the id of its content blob. ``raw`` keeps the exact
    bytes the entry was read from so unchanged entries can be rewritten
    verbatim.
    """
    ctime: int          # Change time (seconds)
    ctime_ns: int       # Change time (nanoseconds)
    mtime: int          # Modification time (seconds)
    mtime_ns: int       # Modification time (nanoseconds)
    dev: int            # Device ID
    ino: int            # Inode number
    mode: int           # 0o100644 or 0o100755
    uid: int            # User ID
    gid: int            # Group ID
    size: int           # File size
    sha1: str           # Blob id, 40 hex chars
    path: str           # Path relative to the work tree
    raw: bytes = field(default=b'', repr=False, compare=False)

    @property
    def is_executable(self) -> bool:
        return self.mode == MODE_EXECUTABLE

    def pack(self) -> bytes:
        """
        Encode the entry in index format.

        Layout: ten big-endian 4-byte fields, 20-byte id, 2-byte path length,
        path bytes, NUL padding.

        Raises:
            ValueError: If the path is not ASCII or contains a NUL byte
        """
        try:
            name = self.path.encode('ascii')
        except UnicodeEncodeError:
            raise ValueError(f"Path is not ASCII: {self.path!r}")
        if b'\0' in name:
            raise ValueError(f"Path contains a NUL byte: {self.path!r}")

        metadata = struct.pack(
            ENTRY_FORMAT,
            _u32(self.ctime),
            _u32(self.ctime_ns),
            _u32(self.mtime),
            _u32(self.mtime_ns),
            _u32(self.dev),
            _u32(self.ino),
            self.mode,
            _u32(self.uid),
            _u32(self.gid),
            _u32(self.size),
            bytes.fromhex(self.sha1),
            min(len(name), MAX_PATH_LENGTH)
        )
        return pad_entry(metadata + name)

    @classmethod
    def unpack(cls, data: bytes) -> 'IndexEntry':
        """Decode one padded entry, keeping its bytes in ``raw``."""
        fields = struct.unpack_from(ENTRY_FORMAT, data)
        path = data[ENTRY_METADATA_SIZE:].replace(b'\0', b'').decode('ascii')

        return cls(
            ctime=fields[0],
            ctime_ns=fields[1],
            mtime=fields[2],
            mtime_ns=fields[3],
            dev=fields[4],
            ino=fields[5],
            mode=fields[6],
            uid=fields[7],
            gid=fields[8],
            size=fields[9],
            sha1=fields[10].hex(),
            path=path,
            raw=bytes(data)
        )

    @classmethod
    def from_file(cls, path: str, sha1: str, file_path: Union[str, Path]) -> 'IndexEntry':
        """
        Build an entry from the current filesystem metadata of a file.

        Args:
            path: Path as recorded in the index
            sha1: Blob id of the file content
            file_path: Location of the file on disk
        """
        st = os.stat(file_path)
        entry = cls(
            ctime=int(st.st_ctime),
            ctime_ns=st.st_ctime_ns % 1_000_000_000,
            mtime=int(st.st_mtime),
            mtime_ns=st.st_mtime_ns % 1_000_000_000,
            dev=st.st_dev,
            ino=st.st_ino,
            mode=MODE_EXECUTABLE if is_executable(file_path) else MODE_REGULAR,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            sha1=sha1,
            path=path
        )
        entry.raw = entry.pack()
        return entry

    def __repr__(self) -> str:
        return f"IndexEntry({self.mode:o} {self.sha1[:7]} {self.path})"


class StagingIndex:
    """
    Delta index (staging area) implementation.

    The index lists the files to be included in the next commit. It is
    stored as one binary file:

    - Header: 'DIRC' + version (4 bytes) + entry count (4 bytes)
    - Entries: sorted by path, each 62 bytes of metadata + path + padding
    - Checksum: SHA-1 of everything before it

    Every save rewrites the whole file.
    """

    def __init__(self, index_path: Union[str, Path], work_tree: Union[str, Path, None] = None):
        """
        Initialize index.

        Args:
            index_path: Location of the index file
            work_tree: Directory tracked paths are relative to
                (defaults to the parent of the metadata directory)
        """
        self.index_path = Path(index_path)
        self.work_tree = Path(work_tree) if work_tree is not None else self.index_path.parent.parent
        self.entries: Dict[str, IndexEntry] = {}
        self.version: int = VERSION

    def load(self) -> None:
        """
        Read the index from disk, replacing in-memory entries.

        A missing file yields an empty index.

        Raises:
            CorruptIndexError: If the checksum, signature or layout is invalid
        """
        if not self.index_path.exists():
            self.entries = {}
            return

        self.entries = self._parse(self.index_path.read_bytes())
        logger.debug("Loaded %d index entries from %s", len(self.entries), self.index_path)

    def _parse(self, data: bytes) -> Dict[str, IndexEntry]:
        if len(data) < HEADER_SIZE + CHECKSUM_SIZE:
            raise CorruptIndexError("Index file is truncated")

        content = data[:-CHECKSUM_SIZE]
        checksum = data[-CHECKSUM_SIZE:]
        if hash_digest(content) != checksum:
            raise CorruptIndexError("Index checksum mismatch")

        signature, version, entry_count = struct.unpack_from(HEADER_FORMAT, data)
        if signature != SIGNATURE:
            raise CorruptIndexError(f"Invalid index signature: {signature!r}")
        if version != VERSION:
            raise CorruptIndexError(f"Unsupported index version: {version}")

        entries = {}
        start = HEADER_SIZE
        end_of_entries = len(content)

        for _ in range(entry_count):
            # Entries are padded to 8 bytes and always end in a NUL, so the
            # last byte of each candidate 8-byte block past the metadata is
            # checked until one is NUL.
            end = start + ENTRY_METADATA_SIZE + 1
            while end < end_of_entries and data[end] != 0:
                end += 8
            if end >= end_of_entries:
                raise CorruptIndexError("Index entry runs past end of file")

            try:
                entry = IndexEntry.unpack(data[start:end + 1])
            except UnicodeDecodeError as e:
                raise CorruptIndexError(f"Index entry at offset {start} has a non-ASCII path") from e
            entries[entry.path] = entry
            start = end + 1

        return entries

    def add(self, new_entries: Mapping[str, str]) -> None:
        """
        Merge ``path -> blob id`` pairs into the index and save it.

        Entries whose id is unchanged keep their previous bytes; new or
        changed paths get a fresh record from current filesystem metadata.

        Args:
            new_entries: Paths relative to the work tree mapped to blob ids
        """
        if not new_entries:
            return

        self.load()

        for path, sha1 in new_entries.items():
            existing = self.entries.get(path)
            if existing is not None and existing.sha1 == sha1 and existing.raw:
                continue
            self.entries[path] = IndexEntry.from_file(path, sha1, self.work_tree / path)
            logger.debug("Staged %s as %s", path, sha1[:8])

        self.write()

    def to_bytes(self) -> bytes:
        """Serialize header, sorted entries and checksum."""
        content = bytearray(struct.pack(HEADER_FORMAT, SIGNATURE, self.version, len(self.entries)))

        for path in sorted(self.entries):
            entry = self.entries[path]
            content += entry.raw or entry.pack()

        content += hash_digest(bytes(content))
        return bytes(content)

    def write(self) -> None:
        """Atomically rewrite the index file."""
        self.index_path.parent.mkdir(parents=True, exist_ok=True)
        atomic_write(self.index_path, self.to_bytes())
        logger.debug("Wrote %d index entries to %s", len(self.entries), self.index_path)

    def fetch_index_data(self) -> Dict[str, Tuple[str, str]]:
        """
        Load the index and map each tracked path to (blob id, mode).

        The mode is taken from the working-copy file's executable bit at call
        time, not from the mode stored in the entry.

        Returns:
            Dict of path to (40-char id, '100755' or '100644')
        """
        self.load()

        tracked = {}
        for path, entry in self.entries.items():
            mode = EXECUTABLE_MODE if is_executable(self.work_tree / path) else BLOB_MODE
            tracked[path] = (entry.sha1, mode)
        return tracked

    def get_entry(self, path: str) -> Optional[IndexEntry]:
        """Get entry by path."""
        return self.entries.get(path)

    def entry_ids(self) -> Dict[str, str]:
        """Map of tracked path to blob id."""
        return {path: entry.sha1 for path, entry in self.entries.items()}

    def paths(self) -> List[str]:
        """Tracked paths in index order."""
        return sorted(self.entries)

    def __contains__(self, path: str) -> bool:
        return path in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"StagingIndex(entries={len(self.entries)})"
