"""Services package — all business logic lives here, never in routers.

Files:
  catalog_query.py  — QuerySpec parsing + filter/sort/paginate pipeline for listings
  filters.py        — category and price filters used by the pipeline
  sorting.py        — stable single-key sort used by the pipeline
  bird.py           — Bird listing/CRUD/image attachment
  product.py        — Product listing/CRUD
  admin.py          — Admin accounts
  auth.py           — Authenticator abstraction + bcrypt password checks
  uploads.py        — ImageUploadBatch (image limit + MIME types per submission)
  mailer.py         — Contact-form SMTP relay

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
