# Routes package init
"""
Sample API: Route Handlers
============================

Route Inventory:
    - agents.py:     GET /agents, POST /agents,
                     PATCH/PUT/DELETE /agents/{agent_id}
    - customers.py:  GET /customers
    - orders.py:     GET /orders
    - health.py:     GET /health

Routes stay thin: pull the body and path parameters, call the service, set
the status code. Errors raised by services are turned into responses by the
exception handlers in main.py.
"""
