"""Pipeline core: file records, runner, descriptor and content-type builders."""
