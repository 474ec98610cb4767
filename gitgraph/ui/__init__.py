"""Qt widgets for interactive graph display"""
