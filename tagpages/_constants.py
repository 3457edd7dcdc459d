"""Common literal values used across tagpages.

These constants keep directory names and file suffixes centralized so the
loader, generators, and tests import the same values without drifting.
Intended for internal use within the tagpages package.

Examples
--------
>>> from tagpages import _constants
>>> _constants.TAG_PAGE_NAME_TEMPLATE.format(tag="ruby")
'ruby.html'
>>> _constants.TAG_PAGE_LAYOUT
'home.html'
"""

CONFIG_FILENAME = "_config.yml"
LAYOUTS_DIR = "_layouts"
POSTS_DIR = "_posts"
DESTINATION_DIR = "_site"
PAGE_EXTENSION = ".html"
TAG_PAGE_LAYOUT = "home.html"
TAG_PAGE_NAME_TEMPLATE = "{tag}" + PAGE_EXTENSION
