"""
Building blocks every resource package leans on.

- db: asyncpg pool gateway and the `get_db` dependency
- errors / error_handlers: ApiError types and the JSON envelope
- ids, pagination: path id parsing and page/limit windows
- observability: logging setup

Resource SQL lives next to its resource (`users/repository.py`, ...), not here.
"""
