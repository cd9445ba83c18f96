'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''
import sys

from .main import main

sys.exit(main())
