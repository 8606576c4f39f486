"""
Job Vault.

Core components:
- api: FastAPI app, routes, schemas, page-auth middleware
- services: jobs, professional history, projects, resumes
- resume: section ordering, layout, HTML rendering, PDF export
- db: persistence client and table models
"""
