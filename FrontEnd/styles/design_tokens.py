# Design tokens for Sleep Tracker UI

COLORS = {
    'background': '#020617',
    'surface': '#0F172A',
    'surface_alt': '#1E293B',
    'border': '#1E293B',
    'primary': '#4F46E5',
    'primary_hover': '#6366F1',
    'accent': '#22D3EE',
    'text': '#F1F5F9',
    'text_muted': '#64748B',
    'goal_met': '#10B981',
    'goal_missed': '#F59E0B',
    'goal_line': '#F43F5E',
    'danger': '#F87171',
    'insight_bg': 'rgba(79,70,229,0.10)',
    'insight_text': '#C7D2FE',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'title_size': 28,
    'title_weight': 'bold',
    'card_title_size': 13,
    'stat_size': 20,
    'text': 14,
    'small': 12,
}
