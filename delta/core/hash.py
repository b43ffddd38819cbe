"""Hash utilities for Delta."""

import hashlib


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return hashlib.sha1(data).hexdigest()


def hash_digest(data: bytes) -> bytes:
    """
    Compute raw SHA-1 digest of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        20-byte digest
    """
    return hashlib.sha1(data).digest()


def object_header(obj_type: str, size: int) -> bytes:
    """Build the ``<type> <size>\\0`` prefix hashed and stored with every object."""
    return f"{obj_type} {size}\0".encode('ascii')


def hash_file(filepath: str) -> str:
    """
    Compute the blob id a file's content would be stored under.
    
    Args:
        filepath: Path to file
        
    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        data = f.read()
    return hash_object(object_header('blob', len(data)) + data)
