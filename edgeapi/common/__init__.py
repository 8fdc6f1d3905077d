"""Request helpers: account, identity, pagination and query filters."""