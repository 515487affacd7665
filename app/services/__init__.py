"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services implement the store interfaces the routers depend on; they call
repositories for DB operations and own each unit of work's commit.
"""
