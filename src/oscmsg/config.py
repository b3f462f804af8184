"""Default configuration of the OSC message builder.

This module is evaluated first when the configuration is loaded.
Configuration files are Python scripts that may override any of the
uppercase variables below, e.g.::

    TYPE_TAGS = {"double": "f", "text": "S"}
    BOOLEAN_COERCION = "integer"

Keys missing from ``TYPE_TAGS`` in a configuration file keep their defaults.
"""

# Address pattern used when none is given on the command line
ADDRESS = "/"

# Type tags of the configurable scalar kinds. Booleans always map to T and F.
TYPE_TAGS = {"integer": "i", "double": "d", "text": "s", "null": "N"}

# Whether derived type tag strings start with a comma
LEADING_COMMA = True

# Conversion applied to booleans before tagging: "none", "integer" or "double"
BOOLEAN_COERCION = "none"
