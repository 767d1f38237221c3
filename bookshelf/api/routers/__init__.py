# This file marks the routers package for API route modules.
