import asyncio
import logging
from collections import Counter

from enums.admin_action import AdminAction
from enums.order_status import OrderStatus
from models.analytics import DashboardStatsDTO
from models.user import ActorDTO
from repositories.order import OrderRepository
from repositories.product import ProductRepository
from repositories.user import UserRepository
from storage.base import StorageBackend
from utils.permission_utils import require_admin


class AnalyticsService:
    """
    Figures for the admin dashboard.

    Revenue counts every order that was not cancelled, whatever its
    fulfilment status; the order total already includes tax and shipping.
    """

    @staticmethod
    async def get_dashboard_stats(actor: ActorDTO | None, storage: StorageBackend) -> DashboardStatsDTO:
        """
        Collect dashboard statistics (admin only).

        Raises:
            PermissionDeniedException: If the actor is not an admin
        """
        require_admin(actor, AdminAction.VIEW_ALL_ORDERS)

        orders, products, profiles = await asyncio.gather(
            OrderRepository.get_all(storage),
            ProductRepository.get_all(storage),
            UserRepository.get_all(storage)
        )

        status_counts = Counter(order.status for order in orders)
        total_revenue = sum(order.total or 0 for order in orders if order.status != OrderStatus.CANCELLED)

        stats = DashboardStatsDTO(
            total_orders=len(orders),
            total_revenue=total_revenue,
            pending_orders=status_counts[OrderStatus.PENDING],
            shipped_orders=status_counts[OrderStatus.SHIPPED],
            delivered_orders=status_counts[OrderStatus.DELIVERED],
            cancelled_orders=status_counts[OrderStatus.CANCELLED],
            total_products=len(products),
            total_users=len(profiles)
        )
        logging.debug(f"Dashboard stats: {stats.model_dump()}")
        return stats
