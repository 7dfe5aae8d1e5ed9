"""
Static showcase panels for the dashboard.
Recent orders, top products and customer metrics are fixed sample values;
only the sales charts and KPIs come from the generated record set.
"""

RECENT_ORDERS = [
    {"id": "#ORD-101", "customer": "Alex Johnson", "date": "2024-01-15", "amount": 2450, "status": "completed"},
    {"id": "#ORD-102", "customer": "Maria Garcia", "date": "2024-01-14", "amount": 1875, "status": "processing"},
    {"id": "#ORD-103", "customer": "James Wilson", "date": "2024-01-14", "amount": 3200, "status": "completed"},
    {"id": "#ORD-104", "customer": "Sarah Lee",    "date": "2024-01-13", "amount": 950,  "status": "pending"},
    {"id": "#ORD-105", "customer": "David Kim",    "date": "2024-01-12", "amount": 1480, "status": "completed"},
]

TOP_PRODUCTS = [
    {"name": "Smartphone X",         "sales": 2450, "revenue": 318500,  "growth": 15.7},
    {"name": "Wireless Earbuds Pro", "sales": 1987, "revenue": 258310,  "growth": 12.3},
    {"name": "4K Smart TV",          "sales": 865,  "revenue": 207600,  "growth": 8.9},
    {"name": "Laptop Elite",         "sales": 743,  "revenue": 1857500, "growth": 18.5},
    {"name": "Smart Watch 3",        "sales": 1321, "revenue": 277410,  "growth": 10.2},
]

# returning_rate and growth are fractions (0.82 == 82%)
CUSTOMER_METRICS = {
    "total": 5245,
    "new_this_month": 345,
    "returning_rate": 0.82,
    "growth": 0.22,
}
