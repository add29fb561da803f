"""
Use Cases

Organized into domain folders:
- auth/: Registration and login
- users/: Account reads, password change, deletion
- posts/: Post CRUD
- comments/: Comment CRUD

Import from the subpackages.
"""
