"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer for users, providers and bookings.
Each repository extends BaseRepository and is exposed as a module-level singleton.
"""
