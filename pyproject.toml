[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "l10nchain"
version = "0.7.2"
description = "Locale fallback chains over localization bundles, with a pseudolocalization helper."
requires-python = ">=3.10"
dependencies = []
keywords = ["localization", "l10n", "i18n", "internationalization", "fallback", "pseudolocalization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Localization",
    "Topic :: Software Development :: Internationalization",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["l10nchain"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
