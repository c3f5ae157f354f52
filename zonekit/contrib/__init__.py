"""
Community-contributed adapters for zonekit.

These are reference implementations maintained alongside the core.
You can use them as-is or customize for your needs.

## Installation

These adapters require optional dependencies:

```bash
# pytz catalog adapter
pip install zonekit[pytz]
```

## Usage

```python
from zonekit import Timezones

try:
    from zonekit.contrib.adapters.catalog import PytzCatalogAdapter
except ImportError:
    # Install with: pip install zonekit[pytz]
    pass

timezones = Timezones(catalog_adapter=PytzCatalogAdapter())
```
"""
