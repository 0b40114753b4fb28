"""
Analytics Service for turning a user's stock into revenue and profit figures.
"""

import logging
from typing import List

from gdfarms.database import Store
from gdfarms.models.item import Item
from gdfarms.schemas import AnalyticsResponse, TopItem

logger = logging.getLogger(__name__)

TOP_ITEMS_LIMIT = 5


class AnalyticsService:
    def compute_analytics(self, store: Store, user_id: str) -> AnalyticsResponse:
        """
        Aggregate all items of the user.

        Totals are computed in Python from the item rows because the top-items
        ranking needs per-row profits anyway. Missing numbers count as 0.
        """
        with store.session_scope() as db:
            items = (
                db.query(Item)
                .filter(Item.user_id == user_id)
                .order_by(Item.id.asc())
                .all()
            )

        total_investment = sum(
            (item.buying_price or 0.0) * (item.quantity or 0.0) for item in items
        )
        total_revenue = sum(
            (item.selling_price or 0.0) * (item.quantity or 0.0) for item in items
        )
        total_profit = total_revenue - total_investment

        profit_margin = (
            round(100 * total_profit / total_investment, 2)
            if total_investment > 0
            else 0.0
        )

        return AnalyticsResponse(
            total_investment=total_investment,
            total_revenue=total_revenue,
            total_profit=total_profit,
            profit_margin=profit_margin,
            total_item_count=len(items),
            top_items=self._top_items(items),
        )

    def _top_items(self, items: List[Item]) -> List[TopItem]:
        # sorted() is stable, so equal profits keep row order
        ranked = sorted(items, key=lambda item: item.profit, reverse=True)
        return [
            TopItem(
                id=item.id,
                name=item.name,
                quantity=item.quantity or 0.0,
                buying_price=item.buying_price or 0.0,
                selling_price=item.selling_price or 0.0,
                profit=item.profit,
            )
            for item in ranked[:TOP_ITEMS_LIMIT]
        ]


analytics_service = AnalyticsService()
