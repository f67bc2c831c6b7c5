"""Application pagination – page clamping and result pages."""
from catalog_query.application.pagination.page import ResultPage
from catalog_query.application.pagination.pager import PageWindow, paginate, total_pages_for

__all__ = ["PageWindow", "ResultPage", "paginate", "total_pages_for"]
