"""
inventory_service package

This package contains the core backend logic for the inventory service.
It includes:

- FastAPI application factory (`main.py`) and routers (`routes/`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Password hashing and JWT logic (`auth.py`) and the auth gate (`deps.py`)
- Account and inventory services (`accounts.py`, `inventory.py`)
- Pydantic schemas (`schemas.py`) and settings (`config.py`)

The tests in this directory exercise each of those layers.
"""
