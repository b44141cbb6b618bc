import io

import setuptools

name = 'chaoscloud'
desc = 'Chaos Toolkit Extension for Aliyun and AWS resources.'

author = "chaoscloud maintainers"
author_email = 'chaoscloud@users.noreply.github.com'
license = 'Apache License 2.0'

packages = setuptools.find_packages(exclude=['test', 'test.*'])

test_require = []
with io.open('requirements-dev.txt') as f:
    test_require = [l.strip() for l in f if l.strip() and not l.startswith('#')]

install_require = []
with io.open('requirements.txt') as f:
    install_require = [l.strip() for l in f if l.strip() and not l.startswith('#')]

setup_params = dict(
    name=name,
    version='0.1.0',
    description=desc,
    author=author,
    author_email=author_email,
    license=license,
    packages=packages,
    install_requires=install_require,
    tests_require=test_require,
    extras_require={'test': test_require},
    entry_points={
        'console_scripts': [
            'chaoscloud = chaoscloud.cli:main',
        ],
    },
    python_requires='>=3.6'
)


def main():
    """Package installation entry point."""
    setuptools.setup(**setup_params)


if __name__ == '__main__':
    main()
