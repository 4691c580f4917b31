from setuptools import setup

# import wake_on_lan.info without importing the package
info = {"__file__": "wake_on_lan/info.py"}

with open(info["__file__"]) as fp:
    exec(fp.read(), info)

version = ''
with open("wake_on_lan/VERSION", "r") as f:
    version = f.read().strip()

with open("README.md", "r") as f:
    long_description = f.read()

with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip()]

setup(
    name=info['__package_name__'],
    version=version,
    description=info['__description__'],
    long_description=long_description,
    long_description_content_type="text/markdown",
    license=info['__license__'],
    author=info['__author__'],
    author_email=info['__author_email__'],
    url=info['__author_url__'],
    python_requires='>=3.10',
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    packages=[
        'wake_on_lan',
        'wake_on_lan.libraries',
        'wake_on_lan.models',
        'wake_on_lan.services',
        'wake_on_lan.utils',
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Topic :: Utilities",
    ],
    entry_points={
        'console_scripts': [
            'wake-on-lan = wake_on_lan:main',
        ],
    },
    include_package_data=True,
    package_data={
        'wake_on_lan': [
            'VERSION',
        ],
    },
)
