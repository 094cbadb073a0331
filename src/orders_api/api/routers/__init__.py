"""
orders_api.api.routers

HTTP routers: health probes, accounts and orders.
"""


# --- Module Notes -----------------------------------------------------------
# Paths are the public wire contract (/order, /orders/all, /register, ...); keep them stable.
