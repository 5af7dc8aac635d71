"""Common literal values used across structcms.

These constants keep the field metadata tag and naming defaults centralized so
the codec, loaders, and tests can import the same values without drifting.
Intended for internal use within the structcms package.

Examples
--------
>>> from structcms import _constants
>>> _constants.FIELD_META_PREFIX
'__structcms_field__'
>>> _constants.SECTION_STRUCT_TEMPLATE.format(name="Hero")
'HeroSection'
"""

FIELD_META_PREFIX = "__structcms_field__"
FIELD_META_VERSION = 1
SECTION_STRUCT_TEMPLATE = "{name}Section"
OBJECT_STRUCT_NAME = "ObjectField"
RENDER_ERROR_TEMPLATE = 'Error rendering section type "%s" at index %s: %s'
