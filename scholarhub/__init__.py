"""
ScholarHub application package.

Modules:
- config: Environment variables and settings
- errors: Error taxonomy mapped to HTTP status codes
- dependencies: Shared dependencies (stores, Gemini, sessions)
- prompts: Centralized LLM prompts
- seed: Seed scholarships, universities and accounts
- models: Pydantic records, request/response schemas
- services: Business logic (store, search, bookmarks, auth, summary)
- routers: API endpoints
"""
