"""Recursive tree construction from flat staged paths."""

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple, Union

from .hash import hash_object, object_header
from .objects import TREE_MODE


@dataclass(frozen=True)
class BlobRef:
    """Leaf of a tree under construction: an already stored blob."""
    id: str
    mode: str


class TreeBuilder:
    """
    Builds a hierarchy of tree objects from ``path -> (blob id, mode)``.

    Each node maps a child name either to a ``BlobRef`` or to another
    ``TreeBuilder``. Children are serialized in name order, so the same set
    of paths always yields byte-identical trees whatever the insertion order.

    Example:
        builder = TreeBuilder()
        builder.add('src/main.py', blob_id, '100644')
        root_id = builder.generate(store)
    """

    mode = TREE_MODE

    def __init__(self):
        self.children: Dict[str, Union[BlobRef, 'TreeBuilder']] = {}

    @classmethod
    def from_index_data(cls, data: Mapping[str, Tuple[str, str]]) -> 'TreeBuilder':
        """
        Build from ``StagingIndex.fetch_index_data()`` output.

        Args:
            data: Mapping of path to (blob id, mode)
        """
        builder = cls()
        for path, (blob_id, mode) in data.items():
            builder.add(path, blob_id, mode)
        return builder

    def add(self, path: str, blob_id: str, mode: str) -> None:
        """
        Insert a blob at a slash-separated path.

        The first segment names a direct child; any remainder is inserted
        recursively into the subtree of that name.

        Args:
            path: Path relative to this node (e.g. 'dir/file.txt')
            blob_id: 40-character blob id
            mode: '100644' or '100755'
        """
        name, sep, rest = path.partition('/')

        if not sep:
            self.children[name] = BlobRef(blob_id, mode)
            return

        subtree = self.children.get(name)
        if not isinstance(subtree, TreeBuilder):
            subtree = TreeBuilder()
            self.children[name] = subtree
        subtree.add(rest, blob_id, mode)

    def serialize(self) -> bytes:
        """Entries of this node, without the tree header."""
        result = bytearray()
        for name in sorted(self.children):
            child = self.children[name]
            result += f"{child.mode} {name}\0".encode('ascii')
            result += bytes.fromhex(child.id)
        return bytes(result)

    def get_content(self) -> bytes:
        """
        Full stored form of this node.

        Format: tree <len>\\0 followed by <mode> <name>\\0<20-byte id> per child
        """
        data = self.serialize()
        return object_header('tree', len(data)) + data

    @property
    def id(self) -> str:
        """Tree id, derived from the ids of all children."""
        return hash_object(self.get_content())

    def generate(self, store) -> str:
        """
        Persist this tree and every subtree, children first.

        Storing is idempotent, so regenerating an already stored hierarchy
        writes nothing new.

        Args:
            store: ObjectStore to write into

        Returns:
            str: Id of this tree
        """
        for name in sorted(self.children):
            child = self.children[name]
            if isinstance(child, TreeBuilder):
                child.generate(store)
        return store.store_raw('tree', self.serialize())

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"TreeBuilder(children={len(self.children)})"
