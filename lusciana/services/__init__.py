"""
High-level use cases for the Lusciana API.

Each service orchestrates a CollectionStore to implement one business area
(accounts, bug reports, quotes). Routers call these services instead of
reading or writing collections directly.
"""
