from pydantic import BaseModel


class DashboardStatsDTO(BaseModel):
    total_orders: int = 0
    total_revenue: int = 0  # Excludes cancelled orders
    pending_orders: int = 0
    shipped_orders: int = 0
    delivered_orders: int = 0
    cancelled_orders: int = 0
    total_products: int = 0
    total_users: int = 0
