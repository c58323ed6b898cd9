"""Domain layer for sitebook application.

Services are imported from their modules (``sitebook.domain.site`` and so
on); this package does not re-export them because the database layer imports
``sitebook.domain.entities``.
"""
