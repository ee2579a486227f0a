# -*- coding: utf-8 -*-
"""WebMap (search + map selection) service package.

- Backend: FastAPI (ASGI)
- Data: data/catalog/{demons,areas,shards,items,misc}.yaml
- UI: lightweight single-page HTML (served by backend)
"""

__all__ = ["__version__"]
__version__ = "0.3.0"
