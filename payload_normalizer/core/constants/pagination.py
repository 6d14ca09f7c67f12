"""分页默认值常量."""

DEFAULT_CURRENT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
DEFAULT_TOTAL_COUNT = 0
