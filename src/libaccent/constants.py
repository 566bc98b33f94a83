"""Settings sources queried by libaccent."""

from __future__ import annotations

import os

#: Program used to call the desktop settings portal over D-Bus.
#: Can be overridden via the :envvar:`LIBACCENT_DBUS_SEND` environment variable.
DBUS_SEND_BIN = os.getenv("LIBACCENT_DBUS_SEND", "dbus-send")

#: Program used to read GSettings keys.
#: Can be overridden via the :envvar:`LIBACCENT_GSETTINGS` environment variable.
GSETTINGS_BIN = os.getenv("LIBACCENT_GSETTINGS", "gsettings")

# https://flatpak.github.io/xdg-desktop-portal/docs/doc-org.freedesktop.portal.Settings.html
PORTAL_DESTINATION = "org.freedesktop.portal.Desktop"
PORTAL_OBJECT_PATH = "/org/freedesktop/portal/desktop"
PORTAL_READ_ONE = "org.freedesktop.portal.Settings.ReadOne"
PORTAL_NAMESPACE = "org.freedesktop.appearance"
PORTAL_ACCENT_KEY = "accent-color"

GNOME_INTERFACE_SCHEMA = "org.gnome.desktop.interface"
GTK_THEME_KEY = "gtk-theme"

# https://extensions.gnome.org/extension/5547/custom-accent-colors/
CUSTOM_ACCENT_COLORS_SCHEMA = "org.gnome.shell.extensions.custom-accent-colors"
CUSTOM_ACCENT_COLORS_KEY = "accent-color"
