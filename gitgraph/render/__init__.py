"""Drawing: context protocol, QPainter backend and graph renderer"""
