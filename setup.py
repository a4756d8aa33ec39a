from setuptools import setup, find_packages

setup(
    name="gtworld",
    version="0.1.0",
    description="Decoder and encoder for Growtopia world-state blobs",
    packages=find_packages(include=['gtworld', 'gtworld.*']),
    install_requires=[
        "construct>=2.10",
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Games/Entertainment",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    zip_safe=False,
)
