"""
Constants and configuration values for the product hierarchy filter.
"""

# Fixed rank order of hierarchy levels (shallowest first)
LEVEL_ORDER = ('category', 'subcategory', 'class', 'product')

# Levels materialized when nothing else is configured
DEFAULT_PRODUCT_LEVELS = ['category', 'subcategory', 'product']

# Depth used by system_config.product_levels when the value is unusable
DEFAULT_LEVEL_DEPTH = 2

# Placeholder bucket for rows without a category
UNCATEGORIZED_LABEL = 'Uncategorized'

# Node id layout: "<level>::<key part>::<key part>..."
NODE_ID_SEPARATOR = '::'
MISSING_KEY_PART = '-'

# Identity fields compared by selection matching, per level.
# Products without an id are identified by name, so both fields are compared.
LEVEL_KEY_FIELDS = {
    'category': ('category_id',),
    'subcategory': ('category_id', 'subcategory_id'),
    'class': ('category_id', 'subcategory_id', 'class_id'),
    'product': ('category_id', 'subcategory_id', 'class_id', 'product_id', 'product_name'),
}

# Fields a selection carries through each level (ids and display names)
LEVEL_FILTER_FIELDS = {
    'category': ('category_id', 'category_name'),
    'subcategory': ('subcategory_id', 'subcategory_name'),
    'class': ('class_id', 'class_name'),
    'product': ('product_id', 'product_name'),
}

# Suffix shown next to a non-product selection in the active filter chip
LEVEL_DISPLAY_NAMES = {
    'category': 'Category',
    'subcategory': 'Subcategory',
    'class': 'Class',
    'product': 'Product',
}

# Catalog columns scanned by free-text search
SEARCH_FIELDS = (
    'product_id',
    'product_name',
    'category_name',
    'subcategory_name',
    'class_name',
)

# Default search parameters
DEFAULT_SEARCH_PARAMS = {
    'debounce_seconds': 0.3,
}
