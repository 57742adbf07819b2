from setuptools import setup, Command


class RunTests(Command):
  user_options = []

  def initialize_options(self):
    pass

  def finalize_options(self):
    pass

  def run(self):
    import sys, subprocess
    errno = subprocess.call([sys.executable, '-m', 'pytest', 'tests'])
    raise SystemExit(errno)


setup(
    name='donkey',
    version='0.1.0',
    description='ring-passing card game simulator',
    license='MIT',
    packages=['donkey', 'donkey.bin', 'donkey.listeners'],
    python_requires='>=3.7',
    install_requires=['click'],
    extras_require={'test': ['pytest']},
    zip_safe=True,
    cmdclass={'unittest': RunTests},
    entry_points = {
        'console_scripts': [
            'donkey = donkey.bin.play:cli'
        ]
    }
)
