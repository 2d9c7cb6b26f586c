"""
Fixed markers of the public suffix list dat file.

The new gTLD section is everything strictly between these two lines.
"""

# Marks the start of the new gTLD section.
PSL_GTLDS_SECTION_HEADER = "// newGTLDs"

# Marks the end of the new gTLD section (and of the ICANN part of the list).
PSL_GTLDS_SECTION_FOOTER = "// ===END ICANN DOMAINS==="
