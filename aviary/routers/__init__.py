"""Routers package — HTTP endpoint definitions.

Files:
  birds.py     — /api/birds     (public listing/detail, admin writes + image uploads)
  products.py  — /api/products  (public listing/detail, admin writes)
  admins.py    — /api/admins    (login/logout, admin account management)
  contact.py   — /api/contact   (contact form email relay)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to aviary/services/.
"""
