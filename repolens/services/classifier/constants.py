"""
Classifier constants.

Static, read-only reference tables shared by every analysis: dependency
descriptions, tech-stack checks, entry-point patterns and the path
conventions used by route and component extraction.
"""

import re
from types import MappingProxyType

# ─────────────────────────────────────────────────────────────
# Dependency Descriptions
# ─────────────────────────────────────────────────────────────

GENERIC_DEPENDENCY_DESCRIPTION = "External dependency"

DEPENDENCY_DESCRIPTIONS: MappingProxyType[str, str] = MappingProxyType({
    # Frameworks
    "react": "UI library for building component-based interfaces",
    "next": "React framework with SSR and file-based routing",
    "express": "Minimal Node.js web framework for APIs",
    "fastify": "Fast and low overhead Node.js web framework",
    "koa": "Expressive HTTP middleware framework",
    "nestjs": "Progressive Node.js framework with TypeScript",
    "@nestjs/core": "Progressive Node.js framework with TypeScript",
    "vue": "Progressive JavaScript framework for UIs",
    "nuxt": "Vue framework with SSR and file-based routing",
    "angular": "Platform for building web applications",
    "@angular/core": "Platform for building web applications",
    "svelte": "Compile-time JavaScript framework",
    "@sveltejs/kit": "Svelte framework with SSR and file-based routing",
    # State management
    "redux": "Predictable state container",
    "@reduxjs/toolkit": "Redux toolkit for efficient state management",
    "zustand": "Small, fast state management",
    "mobx": "Simple, scalable state management",
    "recoil": "State management library for React",
    "jotai": "Primitive and flexible state management",
    # Data fetching
    "axios": "Promise-based HTTP client",
    "swr": "React hooks for data fetching",
    "@tanstack/react-query": "Powerful data fetching and caching",
    "apollo-client": "GraphQL client with caching",
    "@apollo/client": "GraphQL client with caching",
    # Database
    "prisma": "Next-generation ORM for Node.js and TypeScript",
    "@prisma/client": "Next-generation ORM for Node.js and TypeScript",
    "mongoose": "MongoDB object modeling for Node.js",
    "typeorm": "ORM for TypeScript and JavaScript",
    "sequelize": "Promise-based Node.js ORM",
    "drizzle-orm": "TypeScript ORM with SQL-like syntax",
    "knex": "SQL query builder for Node.js",
    # Auth
    "next-auth": "Authentication for Next.js",
    "passport": "Simple authentication middleware",
    "jsonwebtoken": "JWT implementation for Node.js",
    "@supabase/supabase-js": "Supabase client for auth and database",
    "firebase": "Backend-as-a-service platform",
    "@clerk/clerk-sdk-node": "User management and authentication",
    # Styling
    "tailwindcss": "Utility-first CSS framework",
    "styled-components": "CSS-in-JS styling library",
    "@emotion/react": "CSS-in-JS library with React",
    "sass": "CSS preprocessor with variables and nesting",
    "chakra-ui": "Component library for React",
    "@chakra-ui/react": "Component library for React",
    "@mui/material": "Material Design component library",
    "antd": "Ant Design React UI library",
    "radix-ui": "Unstyled accessible components",
    "@radix-ui/react-dialog": "Unstyled accessible components",
    # Testing
    "jest": "JavaScript testing framework",
    "vitest": "Fast Vite-native unit test framework",
    "@testing-library/react": "React component testing utilities",
    "cypress": "E2E testing framework",
    "playwright": "E2E testing for modern web apps",
    # Build tools
    "vite": "Next-generation frontend build tool",
    "webpack": "Module bundler for JavaScript",
    "esbuild": "Extremely fast JavaScript bundler",
    "turbo": "High-performance build system",
    "tsup": "Bundle TypeScript libraries with no config",
    # Utilities
    "lodash": "Modern JavaScript utility library",
    "date-fns": "Modern JavaScript date utility library",
    "dayjs": "Fast 2kB alternative to Moment.js",
    "zod": "TypeScript-first schema validation",
    "yup": "Schema builder for runtime value parsing",
    "uuid": "RFC4122 UUID generator",
    "nanoid": "Tiny, URL-friendly unique ID generator",
    # API clients
    "@octokit/rest": "GitHub REST API client",
    "openai": "OpenAI API client library",
    "stripe": "Payment processing API",
    "twilio": "Cloud communications platform",
    "sendgrid": "Email delivery service",
    "@aws-sdk/client-s3": "AWS S3 SDK for cloud storage",
    # Python
    "django": "Batteries-included Python web framework",
    "fastapi": "Modern async Python web framework for APIs",
    "flask": "Lightweight Python web framework",
    "sqlalchemy": "Python SQL toolkit and ORM",
    "pydantic": "Data validation using Python type hints",
    "httpx": "Async-capable Python HTTP client",
    "requests": "Python HTTP library",
    "pytest": "Python testing framework",
})


# ─────────────────────────────────────────────────────────────
# Tech Stack
# ─────────────────────────────────────────────────────────────

# Checked in this order; each present dependency contributes one entry
TECH_STACK_CHECKS: tuple[tuple[str, str], ...] = (
    # Core frameworks
    ("react", "React"),
    ("next", "Next.js"),
    ("vue", "Vue.js"),
    ("express", "Express.js"),
    ("@nestjs/core", "NestJS"),
    ("typescript", "TypeScript"),
    # Databases
    ("@prisma/client", "Prisma"),
    ("mongoose", "MongoDB"),
    ("@supabase/supabase-js", "Supabase"),
    # Styling
    ("tailwindcss", "Tailwind CSS"),
    ("styled-components", "Styled Components"),
    # Python
    ("fastapi", "FastAPI"),
    ("django", "Django"),
    ("flask", "Flask"),
    ("sqlalchemy", "SQLAlchemy"),
)


# ─────────────────────────────────────────────────────────────
# Entry Points
# ─────────────────────────────────────────────────────────────

ENTRY_POINT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(src/)?(index|main|app|server)\.(ts|js|tsx|jsx)$"),
    re.compile(r"^(src/)?App\.(tsx|jsx)$"),
    re.compile(r"^pages/_app\.(tsx|jsx)$"),
    re.compile(r"^app/layout\.(tsx|jsx)$"),
    re.compile(r"^(src/|app/)?(main|app|server|manage|__main__)\.py$"),
    re.compile(r"^(cmd/[^/]+/)?main\.go$"),
    re.compile(r"^src/main\.rs$"),
)


# ─────────────────────────────────────────────────────────────
# Routes
# ─────────────────────────────────────────────────────────────

HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "PATCH", "DELETE")

# File-based API routing (Next.js pages/api and app/api)
API_DIRECTORY_RE = re.compile(r"(^|/)(pages|app)/api/")
API_PREFIX_RE = re.compile(r"^.*(?:pages|app)/api")
SCRIPT_EXTENSION_RE = re.compile(r"\.(ts|js|tsx|jsx|mjs|cjs)$")


# ─────────────────────────────────────────────────────────────
# Components
# ─────────────────────────────────────────────────────────────

UI_EXTENSIONS: tuple[str, ...] = (".tsx", ".jsx")

# Directory names whose components are tagged as pages
PAGE_DIRECTORIES = frozenset({"pages", "app", "views"})
