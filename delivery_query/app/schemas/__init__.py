"""
Pydantic schema definitions for delivery records.

Input records (``Delivery`` and its parts) and the values derived from
them by the query helper (``DeliveryShortInfo``, ``AverageGapsInfo``)
live side by side in ``schemas.delivery``.
"""
