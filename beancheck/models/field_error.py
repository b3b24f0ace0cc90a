"""
FieldError: one violated rule at one field path.
"""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class FieldError:
    """A single rule violation, addressed by its (possibly composed) field path."""

    path: str
    key: str

    def rehome(self, path: str) -> "FieldError":
        """Return a copy of this error moved to *path*."""
        return replace(self, path=path)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "key": self.key,
        }

    def __repr__(self) -> str:
        return f"FieldError('{self.path}', {self.key})"
