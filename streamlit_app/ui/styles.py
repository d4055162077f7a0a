"""
Global CSS Styling for Place Recommendations.

This module provides load_global_styles() to inject consistent styling
across all pages. It also defines the classes used by the HTML that
recommendations.rendering produces (cards, badges, the listing table).
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Place Recommendations app.

    This function:
    - Sets typography for headings and page headers
    - Lays out the recommendation grid (1 / 2 / 3 columns by viewport width)
    - Styles cards, category badges and website links
    - Clamps descriptions to two lines
    - Gives the listing table a fixed layout so column proportions never change
    """
    css = """
    <style>
        /* Headings */
        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.01em !important;
        }

        .rec-page-header .subtitle {
            color: #6b7280;
            margin-top: -0.5rem;
            margin-bottom: 1rem;
        }

        /* Card grid */
        .rec-grid {
            display: grid;
            gap: 1.5rem;
            grid-template-columns: 1fr;
        }

        @media (min-width: 768px) {
            .rec-grid { grid-template-columns: repeat(2, minmax(0, 1fr)); }
        }

        @media (min-width: 1024px) {
            .rec-grid { grid-template-columns: repeat(3, minmax(0, 1fr)); }
        }

        .rec-card {
            background: white;
            border-radius: 0.5rem;
            box-shadow: 0 1px 3px rgba(0, 0, 0, 0.12);
            overflow: hidden;
            transition: box-shadow 0.2s ease;
        }

        .rec-card:hover {
            box-shadow: 0 6px 16px rgba(0, 0, 0, 0.14);
        }

        .rec-card-image {
            aspect-ratio: 16 / 9;
            width: 100%;
            overflow: hidden;
        }

        .rec-card-image img {
            width: 100%;
            height: 100%;
            object-fit: cover;
        }

        .rec-card-body {
            padding: 1.5rem;
        }

        .rec-card-header {
            display: flex;
            justify-content: space-between;
            align-items: flex-start;
            gap: 0.5rem;
        }

        .rec-title {
            font-size: 1.1rem;
            font-weight: 600;
            color: #111827;
            margin: 0;
        }

        .rec-description {
            color: #4b5563;
            margin: 0.5rem 0 0 0;
        }

        .rec-clamp-2 {
            display: -webkit-box;
            -webkit-line-clamp: 2;
            -webkit-box-orient: vertical;
            overflow: hidden;
        }

        .rec-address {
            color: #6b7280;
            font-size: 0.875rem;
            margin: 0.5rem 0 0 0;
        }

        /* Category badge */
        .rec-badge {
            display: inline-flex;
            align-items: center;
            padding: 0.125rem 0.625rem;
            border-radius: 9999px;
            font-size: 0.75rem;
            font-weight: 500;
            white-space: nowrap;
            background: #e0e7ff;
            color: #3730a3;
        }

        .rec-link {
            display: inline-block;
            margin-top: 1rem;
            font-size: 0.875rem;
            color: #4f46e5 !important;
            text-decoration: none;
        }

        .rec-link:hover {
            color: #6366f1 !important;
        }

        /* Table layout */
        .rec-table {
            width: 100%;
            table-layout: fixed;
            border-collapse: collapse;
            background: white;
            border-radius: 0.5rem;
            overflow: hidden;
        }

        .rec-table th {
            text-align: left;
            font-size: 0.75rem;
            text-transform: uppercase;
            letter-spacing: 0.05em;
            color: #6b7280;
            background: #f9fafb;
            padding: 0.75rem 1rem;
        }

        .rec-table td {
            vertical-align: top;
            padding: 1rem;
            border-top: 1px solid #e5e7eb;
            overflow-wrap: anywhere;
        }

        .rec-table .rec-link {
            margin-top: 0;
        }

        /* Centered status messages (loading / error / empty) */
        .rec-status {
            display: flex;
            justify-content: center;
            align-items: center;
            min-height: 200px;
            color: #6b7280;
        }

        .rec-status--error {
            color: #ef4444;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
