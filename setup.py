#!/usr/bin/env python3
"""
Control Panel - Agent/Order/Task 실행 엔진
Setup script for package installation
"""

import os
from setuptools import setup, find_packages

HERE = os.path.dirname(os.path.abspath(__file__))


# Read README file for long description
def read_file(filename):
    """Read file contents."""
    try:
        with open(os.path.join(HERE, filename), 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return ""


# Read requirements from requirements.txt
def read_requirements():
    """Read requirements from requirements.txt."""
    requirements = []
    try:
        with open(os.path.join(HERE, 'requirements.txt'), 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                # Skip comments and empty lines
                if line and not line.startswith('#'):
                    requirements.append(line)
    except FileNotFoundError:
        pass
    return requirements


setup(
    name="control-panel",
    version="1.0.0",
    author="Control Panel Team",
    description="Agent에 Order를 배정하고 Task를 순차 실행하는 실행 엔진 (이벤트 기반 관찰 지원)",
    long_description=read_file("README.md") or "Control Panel - agent/order/task execution engine",
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    data_files=[
        ("config", ["config/system_config.json"]),
    ],
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Operating System :: OS Independent",
    ],
    keywords="agent, order, task, executor, events, asyncio",
)
