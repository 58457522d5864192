"""Repositories package — one repository per entity, all built on BaseRepository.

How to add a new repository:
  1. Create aviary/repositories/my_entity.py
  2. class MyEntityRepository(BaseRepository[MyEntity]):
         model = MyEntity
  3. Add any entity-specific query methods as needed
"""
