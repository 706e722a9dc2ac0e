# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across DtsGen.

The ``dtsgen.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (API, CLI, config, tests) without pulling
in Click or console concerns.

Included modules:

- ``errors``
  The exception taxonomy raised by the generation pipeline (I/O failures,
  malformed records, empty input) and by configuration loading.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical, with a dedicated ``WOULD_CHANGE`` code for ``--check``.
"""

from __future__ import annotations
