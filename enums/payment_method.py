from enum import Enum


class PaymentMethod(str, Enum):
    COD = "COD"          # Cash on delivery
    ONLINE = "Online"    # Simulated card / UPI payment
