from movement_tracker.core.enums import Role, View, views_for_role


def test_admin_sees_every_view():
    assert views_for_role(Role.ADMIN) == list(View)


def test_staff_does_not_see_admin_view():
    views = views_for_role(Role.STAFF)
    assert View.ADMIN not in views
    assert View.DASHBOARD in views
    assert View.REPORTS in views
