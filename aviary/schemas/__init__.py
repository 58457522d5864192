"""Pydantic schemas package.

Folder intent:
  common.py   — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  bird.py     — Bird DTOs
  product.py  — Product DTOs
  admin.py    — Admin DTOs, login credentials and session payload
  contact.py  — Contact-form message
"""
