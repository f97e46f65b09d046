import time
import secrets
from typing import Optional


class TraceId:
    """
    AWS X-Ray Trace ID format:
    Root=1-timestamp-randomuuid;Parent=parentid;Sampled=sampled
    """

    def __init__(self, root: str, parent: Optional[str] = None, sampled: str = "1"):
        self.root = root
        self.parent = parent
        self.sampled = sampled

    @classmethod
    def generate(cls) -> "TraceId":
        """Generate a new Trace ID (Root=1-timehex-uniqueid)."""
        epoch_hex = f"{int(time.time()):08x}"
        unique_id = secrets.token_hex(12)
        return cls(root=f"1-{epoch_hex}-{unique_id}", sampled="1")

    @classmethod
    def parse(cls, header: str) -> "TraceId":
        """
        Parse an X-Amzn-Trace-Id header string.

        Raises:
            ValueError: when no Root segment can be recovered from the header
        """
        parts = {}
        for part in header.split(";"):
            if "=" in part:
                k, v = part.split("=", 1)
                parts[k.strip()] = v.strip()

        root = parts.get("Root", "")
        parent = parts.get("Parent")
        sampled = parts.get("Sampled", "1")

        # Raw ID without Root= prefix.
        if not root and "-" in header and "=" not in header:
            root = header.strip()

        if not root:
            raise ValueError(f"Invalid trace header: {header!r}")

        return cls(root=root, parent=parent, sampled=sampled)

    def __str__(self) -> str:
        s = f"Root={self.root}"
        if self.parent:
            s += f";Parent={self.parent}"
        if self.sampled:
            s += f";Sampled={self.sampled}"
        return s
