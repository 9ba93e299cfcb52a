# default_styles.py
#
# DS Lab default ASCII style library.
# Every renderer reads its glyphs from DEFAULT_STYLES (or a merged copy of it),
# so the playground can restyle traces without touching the trackers.

DEFAULT_STYLES = {

  "arrayStyles": {
    "cell_open":   "[",
    "cell_close":  "]",
    "highlight_open":  "<",
    "highlight_close": ">",
    "pointer":     "^",
    "index_label": "idx",
    "value_label": "val"
  },

  "stackStyles": {
    "wall":       "|",
    "floor":      "+",
    "top_marker": "<- top"
  },

  "queueStyles": {
    "separator":   " | ",
    "head_marker": "head",
    "tail_marker": "tail"
  },

  "treeStyles": {
    "branch_up":    "┌── ",
    "branch_down":  "└── ",
    "trunk":        "│   ",
    "gap":          "    ",
    "highlight_open":  "(",
    "highlight_close": ")",
    "collapsed":    "…",
    "truncated":    "… (more nodes not shown)"
  },

  "emptyStyles": {
    "glyph": "(empty)"
  }
}
