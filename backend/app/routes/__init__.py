# Routes package init
"""
Greetings API — Routes Package
================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - greetings.py:  GET /          (Hello world)
                     GET /evening   (Good evening)

    Unmatched requests never reach a route module; they are answered by the
    catch-all handler registered in main.py.

Design Principle:
    Routes are THIN. The fixed responses live in GreetingService.
"""
