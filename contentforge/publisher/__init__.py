# Publisher: Article publishing workflow and CMS reports
"""
Publisher module for creating articles in the CMS.

Handles site resolution, find-or-create categories, affiliate tagging and
batch publishing with per-item error isolation, plus read-side reports
(site listing, content briefs, portfolio statistics).
"""

from .reports import PortfolioReports
from .workflow import PublishWorkflow, expect_list, site_not_found

__all__ = [
    "PortfolioReports",
    "PublishWorkflow",
    "expect_list",
    "site_not_found",
]
