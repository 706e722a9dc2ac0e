# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtsGen package.

DtsGen turns line-delimited JSON type definition records, emitted one per
exported symbol by native binding macros, into a single namespace-organized
TypeScript declaration file. It exposes both a CLI and a small typed API
(`dtsgen.api`) for build automation.
"""

from __future__ import annotations
