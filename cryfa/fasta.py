"""FASTA normalization into the byte stream that gets encrypted.

Normalization is total: malformed input is dropped, never reported. A record
survives only if its header is non-empty and none of its sequence lines
contains a space.
"""

import typing
from dataclasses import dataclass, field


@dataclass
class FastaRecord:
    header: bytes
    lines: typing.List[bytes] = field(default_factory=list)

    def render(self) -> bytes:
        return b">" + self.header + b"\n" + b"".join(line + b"\n" for line in self.lines)


@dataclass
class NormalizeStats:
    kept: int = 0
    dropped: int = 0


def _split_lines(data: bytes) -> typing.List[bytes]:
    lines = data.split(b"\n")
    if lines and lines[-1] == b"":
        lines.pop()
    return lines


def iter_records(
    data: typing.Union[bytes, str],
    stats: typing.Optional[NormalizeStats] = None,
) -> typing.Iterator[FastaRecord]:
    """Yield the valid records of *data* in input order."""
    if isinstance(data, str):
        data = data.encode("utf-8", "surrogateescape")
    stats = stats if stats is not None else NormalizeStats()
    current: typing.Optional[FastaRecord] = None

    for line in _split_lines(bytes(data)):
        if not line or line.startswith(b">"):
            if current is not None:
                stats.kept += 1
                yield current
            current = None
            if line:
                header = line[1:]
                if header:
                    current = FastaRecord(header)
                else:
                    stats.dropped += 1
        elif current is not None:
            if b" " in line:
                stats.dropped += 1
                current = None
            else:
                current.lines.append(line)

    if current is not None:
        stats.kept += 1
        yield current


def normalize_with_stats(data: typing.Union[bytes, str]) -> typing.Tuple[bytes, NormalizeStats]:
    stats = NormalizeStats()
    blob = b"".join(record.render() for record in iter_records(data, stats))
    return blob, stats


def normalize(data: typing.Union[bytes, str]) -> bytes:
    """Canonical plaintext: ``>header\\n`` plus each sequence line and ``\\n``."""
    return normalize_with_stats(data)[0]


__all__ = [
    "FastaRecord",
    "NormalizeStats",
    "iter_records",
    "normalize",
    "normalize_with_stats",
]
