"""Navigation tree, homepage strip and breadcrumbs."""
