# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/routers/__init__.py
from .calendar_router import router as calendar_router
