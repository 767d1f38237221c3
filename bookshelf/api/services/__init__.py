# This file marks the services package for the storage accessor used by the books routes.
# Route handlers depend on the service class here, never on the database client directly.
