"""
API Routers - HTTP endpoint handlers

Each router handles a specific domain of functionality:
- orgs: Aggregated public repositories of the configured user's organizations
- health: Health checks and configuration status
"""
