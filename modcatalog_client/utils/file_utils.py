"""Display helpers for mod file metadata."""

from enum import IntEnum
from typing import Optional, Type


class FileStatus(IntEnum):
    PROCESSING = 1
    CHANGES_REQUIRED = 2
    UNDER_REVIEW = 3
    APPROVED = 4
    REJECTED = 5
    MALWARE_DETECTED = 6
    DELETED = 7
    ARCHIVED = 8
    TESTING = 9
    RELEASED = 10
    READY_FOR_REVIEW = 11
    DEPRECATED = 12
    BAKING = 13
    AWAITING_PUBLISHING = 14
    FAILED_PUBLISHING = 15


class FileReleaseType(IntEnum):
    RELEASE = 1
    BETA = 2
    ALPHA = 3


class HashAlgo(IntEnum):
    SHA1 = 1
    MD5 = 2


class FileRelationType(IntEnum):
    EMBEDDED_LIBRARY = 1
    OPTIONAL_DEPENDENCY = 2
    REQUIRED_DEPENDENCY = 3
    TOOL = 4
    INCOMPATIBLE = 5
    INCLUDE = 6


_ACRONYMS = {"SHA1", "MD5"}


def _camel_name(member: IntEnum) -> str:
    # MALWARE_DETECTED -> MalwareDetected
    if member.name in _ACRONYMS:
        return member.name
    return "".join(part.capitalize() for part in member.name.split("_"))


def _lookup(enum_type: Type[IntEnum], value: Optional[int]) -> Optional[IntEnum]:
    try:
        return enum_type(1 if value is None else value)
    except ValueError:
        return None


def get_file_status_name(status: Optional[int] = None) -> str:
    """Name of a file status; None is treated as Processing."""
    member = _lookup(FileStatus, status)
    return _camel_name(member) if member else "Unknown"


def get_release_type_name(release_type: Optional[int] = None) -> str:
    """Name of a release type; None is treated as Release."""
    member = _lookup(FileReleaseType, release_type)
    return _camel_name(member) if member else "Unknown"


def get_hash_algorithm_name(algo: Optional[int] = None) -> str:
    member = _lookup(HashAlgo, algo)
    return _camel_name(member) if member else f"Unknown ({algo})"


def get_dependency_relation_type_name(relation_type: Optional[int] = None) -> str:
    member = _lookup(FileRelationType, relation_type)
    return _camel_name(member) if member else f"Unknown ({relation_type})"


def format_file_size(size_bytes: Optional[int]) -> str:
    """
    Format a byte count with two decimals, e.g. ``1.50 MB``.

    Zero and None are reported as ``Unknown``.
    """
    if not size_bytes:
        return "Unknown"
    units = ["B", "KB", "MB", "GB"]
    size = float(size_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(units) - 1:
        size /= 1024
        unit_index += 1
    return f"{size:.2f} {units[unit_index]}"
