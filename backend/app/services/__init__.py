# Services package init
"""
Greetings API — Services Layer
================================

What:  The route table and its lookup, independent of HTTP.
Why:   Routes handle HTTP details; the service decides which fixed response a
       (method, path) pair gets. The lookup is testable without a client.

Service Inventory:
    - GreetingService: static route table, resolve() and fallback()
"""
