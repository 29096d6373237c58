import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="rootanchors",
    version="0.1",
    description="DNSSEC root zone trust anchors as DS and DNSKEY records",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=['anchorlib'],
    scripts=['rootanchors.py'],
    install_requires=[
        'dnspython>=2.0',
        'pycryptodome',
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
