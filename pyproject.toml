[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algo-drills"
version = "0.1.0"
description = "Worked solutions to classic data-structure and sorting exercises: linked lists, stacks, heaps, selection, intervals and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "heap",
    "linked-list",
    "segment-tree",
    "intervals",
    "selection",
    "cipher",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algo-cipher = "algo_drills.cipher:main"
algo-word-pairs = "algo_drills.word_pairs:main"

[tool.hatch.build.targets.wheel]
packages = ["algo_drills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
