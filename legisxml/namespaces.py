"""XML namespaces used by USLM bill and amendment documents."""

NAMESPACE_USLM = "http://schemas.gpo.gov/xml/uslm"
NAMESPACE_DC = "http://purl.org/dc/elements/1.1/"
NAMESPACE_HTML = "http://www.w3.org/1999/xhtml"
NAMESPACE_XSI = "http://www.w3.org/2001/XMLSchema-instance"
NAMESPACE_XML = "http://www.w3.org/XML/1998/namespace"

# Prefixes carried as root namespace declarations, in emission order
NAMESPACES = {
    "dc": NAMESPACE_DC,
    "html": NAMESPACE_HTML,
    "uslm": NAMESPACE_USLM,
    "xsi": NAMESPACE_XSI,
}
