"""Default skill taxonomy (category -> canonical skill names)."""
from types import MappingProxyType

DEFAULT_SKILL_TAXONOMY = MappingProxyType({
    "languages": ("JavaScript", "TypeScript", "Python", "Java", "C++", "Go"),
    "frameworks": ("React", "Angular", "Vue", "Node.js", "Express", "Django", "Spring"),
    "cloud": ("AWS", "Azure", "GCP", "Lambda", "EC2", "S3", "Kubernetes"),
    "devops": ("Docker", "Kubernetes", "Jenkins", "GitHub Actions", "ArgoCD", "Terraform"),
    "databases": ("MySQL", "PostgreSQL", "MongoDB", "Redis", "SQLite"),
    "testing": ("Jest", "Cypress", "Playwright", "Karma", "Jasmine"),
    "tools": ("Git", "Figma", "Jira", "Bash", "Linux"),
})
