# Attribute ids understood by the renderer
DEFAULT = "less.default"
STRING = "less.string"
COMMENT = "less.comment"
AT_KEYWORD = "less.at_keyword"
MEDIA_QUERY_KEYWORD = "less.media_query_keyword"

# fmt: off
FORMAT_SPECS = {
    DEFAULT: {"color": "#000000"},
    STRING: {"color": "#A31515"},
    COMMENT: {"color": "#008000", "italic": True},
    AT_KEYWORD: {"color": "#0000FF", "bold": True},
    MEDIA_QUERY_KEYWORD: {"color": "#795E26", "bold": True},
}
# fmt: on
