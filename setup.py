from setuptools import setup, find_packages

requirements = []
with open('requirements.txt', 'r') as in_:
  requirements = in_.readlines()

setup(
  name='classroll',
  version='0.1.0',
  description='Timer-driven simulation of assignment release, submission and grading across a classlist.',
  author='classroll developers',
  author_email='classroll@example.com',
  license='BSD',
  packages=find_packages(include=['classroll', 'classroll.*']),
  zip_safe=False,
  install_requires=requirements,
  extras_require={'test': ['pytest']},
  scripts=['bin/classroll']
)
