# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/13 01:30:56
# @Author : Kariko Lin

import sys

from .cli import main

sys.exit(main())
