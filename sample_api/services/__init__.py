# Services package init
"""
Sample API: Services Layer
============================

What:  One stateless service per table, sitting between routes (HTTP) and
       the database session.

Service Inventory:
    - AgentService:    list, create, partial update, replace, delete
    - CustomerService: list
    - OrderService:    list

The three are independent; Customer and Order are read-only and share no
base class with Agent.
"""
