"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic for customer accounts, the provider
directory and bookings. Services raise HTTP exceptions from
``utils.exceptions``; routers own the transaction commit.
"""
