"""Shared type aliases for converter modules."""

from __future__ import annotations

import os
from typing import Literal

type PathInput = str | os.PathLike[str]
type ErrorKind = Literal["missing-source", "codec-failure", "write-failure"]
