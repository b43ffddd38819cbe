"""Delta objects: blobs, trees and commits."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from .hash import hash_object, object_header


BLOB_MODE = '100644'
EXECUTABLE_MODE = '100755'
TREE_MODE = '40000'


class DeltaObject(ABC):
    """Base class for all Delta objects."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object payload to bytes.

        Returns:
            bytes: Serialized object data, without the type header
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object payload from bytes.

        Args:
            data: Serialized object data, without the type header
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, tree, commit)
        """
        return self.__class__.__name__.lower()

    def content(self) -> bytes:
        """
        Return the full stored form of the object.

        Format: <type> <size>\\0<payload>
        """
        data = self.serialize()
        return object_header(self.type, len(data)) + data

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        Returns:
            str: 40-character SHA-1 hash of ``content()``
        """
        if self._hash is None:
            self._hash = hash_object(self.content())
        return self._hash

    @property
    def hash(self) -> str:
        """40-character SHA-1 hash."""
        return self.compute_hash()


class Blob(DeltaObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            data: File content as bytes
        """
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class TreeEntry:
    """
    A single named child of a stored tree.

    - mode: '100644', '100755' or '40000'
    - hash: 40-character id of the child object
    - name: file or directory name
    """

    def __init__(self, mode: str, obj_hash: str, name: str):
        self.mode = mode
        self.hash = obj_hash
        self.name = name

    @property
    def type(self) -> str:
        """Object type the entry points at."""
        return 'tree' if self.mode == TREE_MODE else 'blob'

    def __repr__(self) -> str:
        return f"TreeEntry({self.mode} {self.type} {self.hash[:7]} {self.name})"

    def __lt__(self, other: 'TreeEntry') -> bool:
        return self.name < other.name


class Tree(DeltaObject):
    """
    Flat view of a stored tree object.

    Trees are built by ``delta.core.tree.TreeBuilder``; this class decodes
    them again when reading from the object store.
    """

    def __init__(self):
        super().__init__()
        self.entries: list[TreeEntry] = []

    def add_entry(self, mode: str, obj_hash: str, name: str) -> None:
        """Add entry to tree, keeping entries sorted by name."""
        self.entries.append(TreeEntry(mode, obj_hash, name))
        self.entries.sort()
        self._hash = None

    def serialize(self) -> bytes:
        """
        Serialize tree entries.

        Format per entry: <mode> <name>\\0<20-byte hash>
        """
        result = b''
        for entry in sorted(self.entries):
            result += f"{entry.mode} {entry.name}\0".encode('ascii')
            result += bytes.fromhex(entry.hash)
        return result

    def deserialize(self, data: bytes) -> None:
        self.entries = []
        pos = 0

        while pos < len(data):
            space_pos = data.index(b' ', pos)
            mode = data[pos:space_pos].decode('ascii')

            null_pos = data.index(b'\0', space_pos)
            name = data[space_pos + 1:null_pos].decode('ascii')

            obj_hash = data[null_pos + 1:null_pos + 21].hex()
            self.entries.append(TreeEntry(mode, obj_hash, name))

            pos = null_pos + 21

        self.entries.sort()
        self._hash = None

    def __repr__(self) -> str:
        return f"Tree(entries={len(self.entries)})"


def format_timestamp(when: datetime) -> str:
    """
    Render a commit date such as ``Mon Oct 19 03:04:05 2026 +02:00``.

    A zero UTC offset is written as ``Z``.
    """
    offset = when.strftime('%z')
    if offset in ('', '+0000', '-0000'):
        zone = 'Z'
    else:
        zone = f"{offset[:3]}:{offset[3:5]}"
    return f"{when.strftime('%a %b')} {when.day} {when.strftime('%I:%M:%S')} {when.year} {zone}"


class Commit(DeltaObject):
    """
    Represents a commit with metadata.

    Payload format::

        tree <tree-hash>
        parent <parent-hash>      (absent for a root commit)
        Author: Name <email>
        Date:   <timestamp>
        <commit message>
    """

    def __init__(self):
        super().__init__()
        self.tree: str = ''
        self.parent: Optional[str] = None
        self.author: str = ''
        self.date: str = ''
        self.message: str = ''

    @property
    def is_root(self) -> bool:
        """True when the commit has no parent."""
        return self.parent is None

    def serialize(self) -> bytes:
        lines = [f'tree {self.tree}']
        if self.parent is not None:
            lines.append(f'parent {self.parent}')
        lines.append(f'Author: {self.author}')
        lines.append(f'Date:   {self.date}')
        lines.append(self.message)
        return '\n'.join(lines).encode('utf-8')

    def deserialize(self, data: bytes) -> None:
        lines = data.decode('utf-8').split('\n')
        self.parent = None

        pos = 0
        while pos < len(lines):
            line = lines[pos]
            if line.startswith('tree '):
                self.tree = line[5:]
            elif line.startswith('parent '):
                self.parent = line[7:]
            elif line.startswith('Author: '):
                self.author = line[8:]
            elif line.startswith('Date:   '):
                self.date = line[8:]
                pos += 1
                break
            pos += 1

        self.message = '\n'.join(lines[pos:])
        self._hash = None

    @classmethod
    def create(
        cls,
        tree_hash: str,
        parent_hash: Optional[str],
        author: str,
        message: str,
        when: Optional[datetime] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            tree_hash: Hash of the root tree object
            parent_hash: Hash of the parent commit, or None for a root commit
            author: Author name and email (e.g., "Name <email>")
            message: Commit message
            when: Commit time (defaults to local now)

        Returns:
            Commit: New commit object
        """
        if when is None:
            when = datetime.now().astimezone()

        commit = cls()
        commit.tree = tree_hash
        commit.parent = parent_hash
        commit.author = author
        commit.date = format_timestamp(when)
        commit.message = message
        return commit

    def __repr__(self) -> str:
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
