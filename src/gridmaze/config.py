import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional, Tuple


class MazeConfigError(ValueError):
    """Invalid maze configuration; raised before any grid is allocated."""


@dataclass(frozen=True)
class MazeConfig:
    width: int = 10
    depth: int = 10
    cell_size: float = 1.0
    # Paced mode: pause before carving, then after every carve step (seconds).
    animate: bool = False
    step_delay: float = 0.05
    initial_delay: float = 0.5
    room_count: int = 5
    start: Tuple[int, int] = (0, 0)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("width", "depth", "room_count"):
            if not _is_int(getattr(self, name)):
                raise MazeConfigError(f"{name} must be an int, got {getattr(self, name)!r}")
        if not (isinstance(self.start, tuple) and len(self.start) == 2
                and all(_is_int(v) for v in self.start)):
            raise MazeConfigError(f"start must be an (x, z) pair of ints, got {self.start!r}")
        if self.width <= 0 or self.depth <= 0:
            raise MazeConfigError(f"width and depth must be positive, got {self.width}x{self.depth}")
        if self.room_count < 0:
            raise MazeConfigError(f"room_count must be >= 0, got {self.room_count}")
        if self.cell_size <= 0:
            raise MazeConfigError(f"cell_size must be positive, got {self.cell_size}")
        if self.step_delay < 0 or self.initial_delay < 0:
            raise MazeConfigError("delays must be >= 0")
        sx, sz = self.start
        if not (0 <= sx < self.width and 0 <= sz < self.depth):
            raise MazeConfigError(f"start {self.start} outside {self.width}x{self.depth} grid")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, prefix: str = "GRIDMAZE_",
                 base: Optional["MazeConfig"] = None) -> "MazeConfig":
        """
        Overlay PREFIX_<FIELD> environment values on `base` (defaults if None).
        START is given as "x,z"; ANIMATE accepts 1/true/yes/on.
        """
        env = os.environ if environ is None else environ
        base = base or cls()
        overrides = {}
        for f in fields(cls):
            key = prefix + f.name.upper()
            if key not in env:
                continue
            raw = env[key].strip()
            try:
                overrides[f.name] = _parse_field(f.name, raw)
            except ValueError as e:
                raise MazeConfigError(f"{key}={raw!r}: {e}") from e
        return replace(base, **overrides)


def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _parse_field(name: str, raw: str):
    if name == "animate":
        return raw.lower() not in {"0", "false", "no", "off", ""}
    if name in ("cell_size", "step_delay", "initial_delay"):
        return float(raw)
    if name == "start":
        parts = raw.split(",")
        if len(parts) != 2:
            raise ValueError("expected x,z")
        return (int(parts[0]), int(parts[1]))
    if name == "seed":
        return None if raw.lower() in ("", "none") else int(raw)
    return int(raw)
