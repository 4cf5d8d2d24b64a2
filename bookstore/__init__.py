"""Bookstore query runner: CRUD, queries, aggregations and indexes against MongoDB."""
