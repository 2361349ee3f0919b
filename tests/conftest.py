"""Root conftest - shared repository fixtures for all engine tests."""

import pytest

from tests.helpers.fakes import FakeRepo


@pytest.fixture
def next_app_repo() -> FakeRepo:
    """A small Next.js application with a file-based API route."""
    return FakeRepo(
        {
            "package.json": '{"name": "shop"}',
            "README.md": "# Shop",
            "node_modules/react/index.js": "module.exports = {}",
            "src/pages/api/users.ts": (
                "import type { NextRequest } from 'next/server'\n"
                "\n"
                "export async function GET(req: NextRequest) {\n"
                "  return Response.json([])\n"
                "}\n"
            ),
            "src/components/Header.tsx": (
                "import { useState } from 'react'\n"
                "\n"
                "export function Header() {\n"
                "  const [open, setOpen] = useState(false)\n"
                "  return <header />\n"
                "}\n"
            ),
            "src/pages/index.tsx": "export default function Home() {\n  return <main />\n}\n",
            "public/logo.svg": "<svg />",
        }
    )


@pytest.fixture
def next_manifest() -> dict:
    """package.json for the Next.js fixture repository."""
    return {
        "name": "shop",
        "dependencies": {"next": "^14.1.0", "react": "^18.2.0", "react-dom": "^18.2.0"},
        "devDependencies": {"typescript": "^5.3.0", "tailwindcss": "^3.4.0"},
    }
