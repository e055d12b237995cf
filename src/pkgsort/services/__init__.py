"""Service layer — wraps the domain in the uniform ServiceResult contract."""
