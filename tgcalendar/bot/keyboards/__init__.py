# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/keyboards/__init__.py
