# backend/projecthub/utils/__init__.py
