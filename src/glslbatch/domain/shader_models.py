from __future__ import annotations

"""
Shader Domain Data Models.

Defines the value objects exchanged between the discovery service and the
compiler invocation stage. File paths stay typed as a sequence until the
moment they are flattened into a process argument vector.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

# -----------------------------------------------------------------------------
# DISCOVERY MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ShaderFileList:
    """
    Ordered collection of absolute shader source paths.

    Order is the traversal order of the discovery walk. Duplicates are not
    removed.

    Attributes:
        root_path: Absolute directory the walk started from.
        paths: Absolute file paths in visit order.
    """
    root_path: str
    paths: Tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def sorted(self) -> ShaderFileList:
        return ShaderFileList(root_path=self.root_path, paths=tuple(sorted(self.paths)))

# -----------------------------------------------------------------------------
# INVOCATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CompileInvocation:
    """
    A fully assembled compiler command.

    Attributes:
        compiler: Executable name or absolute path.
        argv: Complete argument vector, ``argv[0]`` being the compiler.
        files: The shader paths placed at the tail of ``argv``.
        working_dir: Directory the child process runs in.
    """
    compiler: str
    argv: List[str] = field(default_factory=list)
    files: Tuple[str, ...] = ()
    working_dir: Optional[str] = None


@dataclass(frozen=True)
class CompileResult:
    """
    Outcome of a single compiler run.

    Attributes:
        launched: False if the process could not be started at all.
        exit_code: Child exit status (127 when not launched).
        error: Description of a launch failure or non-zero exit.
    """
    launched: bool
    exit_code: int
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.launched and self.exit_code == 0
