"""Stylesheets injected by the pre-parse style rules."""

from __future__ import annotations

from amptheme.domain.templates import CssTemplate, Slot, css
from amptheme.domain.types import Theme

# Theme styles target img/video, which the CSS pipeline rewrites to
# amp-img/amp-video; object-fit only works on the inner img/video.
MASTHEAD_STYLES = css(
    """
.has-header-image .custom-header-media amp-img > img,
.has-header-video .custom-header-media amp-video > video{
	position: fixed;
	height: auto;
	left: 50%;
	max-width: 1000%;
	min-height: 100%;
	min-width: 100%;
	min-width: 100vw; /* vw prevents 1px gap on left that 100% has */
	width: auto;
	top: 50%;
	padding-bottom: 1px; /* Prevent header from extending beyond the footer */
	-ms-transform: translateX(-50%) translateY(-50%);
	-moz-transform: translateX(-50%) translateY(-50%);
	-webkit-transform: translateX(-50%) translateY(-50%);
	transform: translateX(-50%) translateY(-50%);
}
.has-header-image:not(.twentyseventeen-front-page):not(.home) .custom-header-media amp-img > img {
	bottom: 0;
	position: absolute;
	top: auto;
	-ms-transform: translateX(-50%) translateY(0);
	-moz-transform: translateX(-50%) translateY(0);
	-webkit-transform: translateX(-50%) translateY(0);
	transform: translateX(-50%) translateY(0);
}
/* For browsers that support object-fit */
@supports ( object-fit: cover ) {
	.has-header-image .custom-header-media amp-img > img,
	.has-header-video .custom-header-media amp-video > video,
	.has-header-image:not(.twentyseventeen-front-page):not(.home) .custom-header-media amp-img > img {
		height: 100%;
		left: 0;
		-o-object-fit: cover;
		object-fit: cover;
		top: 0;
		-ms-transform: none;
		-moz-transform: none;
		-webkit-transform: none;
		transform: none;
		width: 100%;
	}
}
""",
)

NAV_MENU_BASE_STYLES = css(
    "\n/* Show the button*/\n.no-js ",
    Slot("menu_button_class", "."),
    """ {
	display: block;
}

/* Override no-js selector in parent theme. */
.no-js .main-navigation ul ul,
.no-js .widget_nav_menu ul ul {
	display: none;
}

/* Use sibling selector and re-use class on button instead of toggling toggle-on class on ul.sub-menu */
.main-navigation ul """,
    Slot("sub_menu_toggle_class", "."),
    """ + .sub-menu,
.widget_nav_menu ul """,
    Slot("sub_menu_toggle_class", "."),
    """ + .sub-menu {
	display: block;
}
""",
)

NAV_MENU_TWENTYSEVENTEEN_STYLES = css(
    "\n.no-js ",
    Slot("nav_container_id", "#"),
    """ > div > ul {
	display: none;
}
.no-js """,
    Slot("nav_container_id", "#"),
    Slot("nav_container_toggle_class", "."),
    """ > div > ul {
	display: block;
}
@media screen and (min-width: 48em) {
	.no-js """,
    Slot("menu_button_class", "."),
    ",\n\t.no-js ",
    Slot("dropdown_class", "."),
    """ {
		display: none;
	}
	.no-js .main-navigation ul,
	.no-js .main-navigation ul ul,
	.no-js .main-navigation > div > ul {
		display: block;
	}
}
""",
)

NAV_MENU_TWENTYFIFTEEN_STYLES = css(
    """
.widget_nav_menu li {
	position: relative;
}
.widget_nav_menu li .dropdown-toggle {
	margin: 0;
	padding: 0;
}

@media screen and (min-width: 59.6875em) {
	/* Emulates the theme's scripted sticky sidebar */
	#sidebar {
		position: sticky;
		top: -9vh;
		max-height: 109vh;
		overflow-y: auto;
	}
}
""",
)

_NAV_MENU_THEME_STYLES: dict[str, CssTemplate] = {
    Theme.TWENTYSEVENTEEN: NAV_MENU_TWENTYSEVENTEEN_STYLES,
    Theme.TWENTYFIFTEEN: NAV_MENU_TWENTYFIFTEEN_STYLES,
}


def nav_menu_styles(template: str) -> CssTemplate:
    """Nav menu template for *template*; themes without extras get the base rules."""
    extra = _NAV_MENU_THEME_STYLES.get(template)
    if extra is None:
        return NAV_MENU_BASE_STYLES
    return NAV_MENU_BASE_STYLES + extra
