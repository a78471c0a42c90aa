[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gklib"
version = "5.2.0"
description = "Algorithmic building blocks: quicksort, max-priority queues, vector helpers, a 64-bit Mersenne Twister, PageRank, string and PSSM utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "quicksort", "mersenne twister", "pagerank", "tokenizer", "pssm"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["gklib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
