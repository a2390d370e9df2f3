"""
Auto-import all pattern modules to ensure registration side-effects run.

After importing this package, `registry.list_patterns()` and `registry.list_entries()`
know about every pattern example.
"""
from __future__ import annotations

import importlib
import pkgutil

from algopatterns import patterns as _patterns_pkg

PATTERN_MODULES: list[str] = []

for _module in pkgutil.iter_modules(_patterns_pkg.__path__, _patterns_pkg.__name__ + "."):
    importlib.import_module(_module.name)
    PATTERN_MODULES.append(_module.name.rsplit(".", 1)[-1])
