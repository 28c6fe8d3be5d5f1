"""
Package logger. The library never installs handlers, enable the records with

```python
logging.getLogger("integration_env").setLevel(logging.DEBUG)
```

or with pytest's ``--log-level=DEBUG``.
"""

import logging

log = logging.getLogger("integration_env")
