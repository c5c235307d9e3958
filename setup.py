import os
from setuptools import setup


def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as file:
        return file.read()


setup(
    name = "porterstem",
    version = "0.1.0",
    author = "Agapitus Keyka Vigiliant",
    author_email = "keka.vigi@gmail.com",
    description = ("Porter stemmer for English words."),
    license = "MIT",
    keywords = "linguistic stemming porter english language",
    package_dir={'': 'src'},
    packages=['porterstem'],
    python_requires='>=3.9',
    extras_require={'test': ['pytest']},
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: MIT License",
    ],
 )
