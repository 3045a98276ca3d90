import pytest

from aetherfiles.apps import (
    AppKind,
    UninstallPlan,
    parse_dpkg_search,
    plan_uninstall,
    result_message,
    uninstall_command,
)

FLATPAK_DESKTOP = "/var/lib/flatpak/exports/share/applications/org.example.App.desktop"
SNAP_DESKTOP = "/var/lib/snapd/desktop/applications/demo_demo.desktop"
DEB_DESKTOP = "/usr/share/applications/editor.desktop"


def test_plan_flatpak():
    plan = plan_uninstall(FLATPAK_DESKTOP, "ignored --arg")
    assert plan.kind is AppKind.FLATPAK
    assert plan.flatpak_id == "org.example.App"
    assert plan.exec_binary is None


def test_plan_snap():
    plan = plan_uninstall(SNAP_DESKTOP)
    assert plan.kind is AppKind.SNAP
    assert plan.snap_name == "demo_demo"


def test_plan_deb_takes_first_word_of_exec():
    plan = plan_uninstall(DEB_DESKTOP, "editor\t%U")
    assert plan.kind is AppKind.DEB
    assert plan.exec_binary == "editor"
    assert plan.desktop_path == DEB_DESKTOP


def test_plan_deb_without_exec():
    plan = plan_uninstall(None, "")
    assert plan == UninstallPlan(AppKind.DEB)


def test_parse_dpkg_search_first_line():
    output = "editor-common: /usr/share/applications/editor.desktop\nother: /x\n"
    assert parse_dpkg_search(output) == "editor-common"


@pytest.mark.parametrize("output", [None, "", "no colon here\n"])
def test_parse_dpkg_search_nothing(output):
    assert parse_dpkg_search(output) is None


def test_uninstall_command_flatpak():
    plan = plan_uninstall(FLATPAK_DESKTOP)
    assert uninstall_command(plan) == [
        "flatpak", "uninstall", "--noninteractive", "-y", "org.example.App"]


def test_uninstall_command_snap():
    plan = plan_uninstall(SNAP_DESKTOP)
    assert uninstall_command(plan) == ["pkexec", "snap", "remove", "demo_demo"]


def test_uninstall_command_deb():
    plan = plan_uninstall(DEB_DESKTOP, "editor")
    assert uninstall_command(plan, "editor-pkg") == [
        "pkexec", "apt-get", "remove", "-y", "--auto-remove", "editor-pkg"]


def test_uninstall_command_deb_needs_package():
    with pytest.raises(ValueError):
        uninstall_command(plan_uninstall(DEB_DESKTOP, "editor"))


def test_result_message_flatpak():
    plan = plan_uninstall(FLATPAK_DESKTOP)
    ok = result_message(plan, True)
    assert '"org.example.App"' in ok
    assert ok.startswith("تم إزالة برنامج Flatpak")
    fail = result_message(plan, False, 7)
    assert fail.startswith("فشل flatpak uninstall") and "7" in fail


def test_result_message_deb_cases():
    plan = plan_uninstall(DEB_DESKTOP, "editor")
    assert result_message(plan, False, 1, None) == "لم يتم العثور على الحزمة باستخدام dpkg."
    assert result_message(plan, True, 0, "pkgname").startswith("تم إزالة الحزمة")
    assert result_message(plan, False, None, "pkgname").startswith("تعذر تشغيل pkexec")
    failed = result_message(plan, False, 100, "pkgname")
    assert failed.startswith("فشل apt-get remove") and '"pkgname"' in failed


def test_result_message_snap_failure():
    plan = plan_uninstall(SNAP_DESKTOP)
    assert result_message(plan, False, 3).startswith("فشل snap remove")
    assert '"demo_demo"' in result_message(plan, True)